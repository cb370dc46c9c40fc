"""
Core data layer.

This package contains:
- text_utils: whitespace trimming shared by the parsers
- records: record types and the best-effort integer rule
- tabular_loader: parse the curricular CSV file
- nested_loader: parse the extracurricular nested key:value file
- reports: correlation lookup and the six report variants
- report_writer: serialize a report table to CSV
- errors: exception hierarchy
"""
