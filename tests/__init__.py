"""Test suite for the tck-inspection package.

This package contains unit tests validating the data model, value
formatting, rendering of steps, records, locations and listings, the
markup serializer and the command-line interface.
"""
