"""
Presentation layer.

Provides the interfaces around the search core:
- flask_app: Browser grid editor with animated playback
- components.charts: Plotly figures comparing algorithm runs
"""
