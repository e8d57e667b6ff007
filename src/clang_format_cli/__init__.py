"""Command-line front end for clang_format_invoker"""
