"""Roster Manager package.

This package is organized by feature modules (roster, transcoder) with a thin
Flask controller layer on top of pure reducer functions and a service layer.
"""
