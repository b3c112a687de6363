"""Geofenced attendance package.

Organized by feature modules (geofence, position, attendance) with a thin
Flask controller layer on top of plain service/state-machine classes.
"""
