"""Command line tools and diagnostics"""
