"""
Adapter implementations for the Sailing Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, algorithms, and objectives.
"""
