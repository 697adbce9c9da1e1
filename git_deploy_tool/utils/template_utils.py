"""Template processing utilities"""

import os
import string
from datetime import datetime
from typing import Dict, Any, Optional


def render_template(template: str,
                    variables: Dict[str, Any],
                    safe: bool = True) -> str:
    """
    Render template with variables

    Placeholders use ``string.Template`` syntax (``$NAME`` or ``${NAME}``).

    Args:
        template: Template string
        variables: Variables to substitute
        safe: Use safe substitution (leave unknown placeholders intact)

    Returns:
        Rendered string
    """
    now = datetime.now()
    context = {
        'NOW': now.isoformat(timespec='seconds'),
        'DATE': now.strftime('%Y-%m-%d'),
        'TIME': now.strftime('%H:%M:%S'),
        'YEAR': str(now.year),
        'MONTH': str(now.month).zfill(2),
        'DAY': str(now.day).zfill(2),
        'USER': os.environ.get('USER', 'unknown'),
    }

    # Override with provided variables
    context.update({key: str(value) for key, value in variables.items()})

    tmpl = string.Template(template)

    if safe:
        return tmpl.safe_substitute(context)
    else:
        return tmpl.substitute(context)


def render_commit_message(template: str,
                          site_uid: str,
                          site_name: Optional[str] = None,
                          branch: Optional[str] = None,
                          count: Optional[int] = None) -> str:
    """
    Render the commit message for a site deployment

    Available placeholders: ``$SITE``, ``$SITE_UID``, ``$BRANCH``,
    ``$COUNT`` plus the date/time variables of :func:`render_template`.

    Args:
        template: Configured commit message template
        site_uid: Stable site identifier
        site_name: Human readable site name
        branch: Target branch
        count: Number of files synchronized for the site

    Returns:
        Rendered commit message
    """
    variables = {
        'SITE': site_name or site_uid,
        'SITE_UID': site_uid,
    }
    if branch:
        variables['BRANCH'] = branch
    if count is not None:
        variables['COUNT'] = count

    return render_template(template, variables).strip()
