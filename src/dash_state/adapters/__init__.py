"""Host adapters that drive navigation state from a UI toolkit."""
