"""Unit converter: a fixed registry of physical unit conversions.

The registry (``unitconv.conversions``) is the core. The interactive menu,
command line and HTTP app are thin layers that call ``ConversionRegistry.convert``.
"""

__version__ = "0.1.0"
