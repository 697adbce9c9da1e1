"""Command line interface for git-deploy-tool"""
