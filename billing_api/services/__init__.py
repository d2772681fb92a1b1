"""Business logic for accounts and billings."""
