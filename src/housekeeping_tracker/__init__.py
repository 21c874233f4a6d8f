"""Housekeeping Tracker package.

Feature modules (rooms, areas, staff, reset, ...) sit on top of a row store
abstraction over a spreadsheet, with a thin Flask controller layer on top.
"""
