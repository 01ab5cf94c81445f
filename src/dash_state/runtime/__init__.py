"""Runtime services (telemetry) shared by the adapter layer."""
