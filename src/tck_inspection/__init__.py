"""Inspection renderer for openCypher TCK scenarios.

The `tck_inspection` package turns conformance-test scenarios into an
abstract markup tree that can be serialized to HTML and browsed.

Key features:
- immutable, validated models for scenarios, steps and value records;
- exhaustive rendering of every step kind with fixed formatting rules;
- location lines, scenario listings and single-scenario views;
- an escaping HTML serializer for the produced markup tree.

Loading scenarios from storage and building URLs are left to the host
application; both enter the package as plain values and callables.
"""
