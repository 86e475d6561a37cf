"""In-memory ledger of freelance jobs, proposals and agreements with a binary call interface."""

__version__ = "0.1.0"
__all__ = ["models", "jobs", "proposals", "agreements", "contract"]