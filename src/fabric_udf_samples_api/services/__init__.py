"""Services implementing the business logic of the API."""
