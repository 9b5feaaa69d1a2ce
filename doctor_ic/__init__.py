"""IC Generator – doctor-wise patient charge sheets from billing exports."""

__version__ = "1.0.0"
