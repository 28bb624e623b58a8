"""
Core modules for the customer table.

Submodules:
    core.models     - Record types, CustomerDraft, UIStatus, record parsing
    core.errors     - NetworkError, ParseError, ValidationError, SubmissionError
    core.state      - Immutable ViewState and pure transitions
    core.table      - Column derivation and table layout
    core.api_client - requests-based client for the customers API
    core.controller - Loader + create form over the view state
"""
