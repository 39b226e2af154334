"""
The MODEL layer contains pure data structures and math.
It has NO knowledge of the GUI (Qt) or the plotting library (pyqtgraph).
It deals with trigonometry, path sampling and the geometry of the diagrams.
"""
