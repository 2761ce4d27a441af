"""
Infrastructure layer.

Adapters implementing domain ports against Cloud Datastore and Cloud SQL.
"""
