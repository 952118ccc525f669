"""datescaffold — dated folder and template scaffolding."""

__version__ = "0.1.0"
