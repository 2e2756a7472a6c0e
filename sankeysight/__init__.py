"""SankeySight — single-direction Sankey diagram layout engine."""

__version__ = "0.1.0"
