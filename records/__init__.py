"""Records application for the clinicals backend.

This package contains the models, serializers, services, views and route
registrations for patients and the clinical measurements taken for them.
"""
