"""Runner, orchestration, progress and result rendering services."""
