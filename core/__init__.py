"""Core application for the hospital patient management project.

This package holds the patient and account models, the stores and
services built on them, and the views and routes of the web layer.
"""
