"""Interactive visualization of trigonometric functions and their mechanical analogues."""
__version__ = "0.1.0"
