"""Service Orders bounded context - repair order lifecycle."""
