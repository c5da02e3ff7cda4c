"""
Roster ingestion.

Modules
-------
record_parser : parse_employee_row() — one source row mapping → EmployeeRecord.
roster        : load_employee_csv(), search_employees(), find_employee().
"""
