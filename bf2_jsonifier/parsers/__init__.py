"""Parsers for the line-oriented ASPX stats format.

Each parser is pure: it takes raw upstream text or intermediate datasets and
returns plain Python structures. Parsers never perform network I/O.
"""
