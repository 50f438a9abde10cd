"""Application infrastructure: bootstrap, logging, errors, signals and timers."""
