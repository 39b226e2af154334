"""Physics demo views, one module per demo. Each registers itself via `register_demo`."""
