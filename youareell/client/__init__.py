"""Client side: transport, command dispatch, watch loop and console."""
