"""Runtime configuration, logging, errors and event wiring."""
