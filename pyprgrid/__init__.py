"""Pyprgrid - activities and a 2D workspace grid for Hyprland.

Workspaces are grouped into named activities, each laid out as a grid
(3x3 by default). The CLI moves between neighbouring workspaces, cycles
activities, optionally switches workspaces when the mouse reaches a screen
edge and prints a status block suitable for status bars.
"""
