"""Host adapters that put the editor core on screen."""
