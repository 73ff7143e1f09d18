"""Command line interface for dk"""
