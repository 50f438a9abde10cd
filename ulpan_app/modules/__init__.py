"""Feature modules of the Ulpan app."""
