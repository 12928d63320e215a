"""
Building blocks of the ChartViewer window: control panel, chart cards, log window
and the file operations bound to the viewer.
"""
