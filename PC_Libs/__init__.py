"""
PC_Libs - PNG Colorizer Library Modules

This package contains the core functionality of PNG Colorizer,
organized into specialized sub-packages:

- ColorizeLib: Pixel buffers, color matching, region selection and recoloring
- StoreLib: Settings persistence and image output
"""

__version__ = "0.1.0"
