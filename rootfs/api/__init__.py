"""
The **api** Django app presents a RESTful web API for validating Gateway API
routes before a control plane accepts them.
"""

__version__ = '1.0.0'
