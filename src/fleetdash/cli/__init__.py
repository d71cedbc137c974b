"""FleetDash command-line interface."""
