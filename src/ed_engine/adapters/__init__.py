"""Host adapters: console session and Textual UI."""
