"""Routing — ordered route registry with first-match resolution.

Path templates are compiled to anchored regular expressions at
registration time; resolution scans them in registration order.
"""
