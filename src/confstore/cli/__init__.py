"""confstore command line interface."""
