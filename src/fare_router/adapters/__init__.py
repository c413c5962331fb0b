"""
Adapter implementations for the Fare Router.

Adapters are concrete implementations of the port interfaces.
Each one holds the backend-specific code behind a single port.
"""
