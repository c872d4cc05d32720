"""Response constants for the trigger API."""

SUCCESS_MESSAGE = "Meeting recording processed successfully."
