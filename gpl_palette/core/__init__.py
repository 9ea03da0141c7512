"""gpl_palette.core — Foundation layer.

Contains the colour and palette model, the GIMP palette codec, the default
palette factory, and the report/swatch helpers used by the CLI.
This module has NO dependencies on gpl_palette.commands or gpl_palette.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
