"""Billing API: accounts, password recovery and per-user billings."""
