"""
sitepush — Static website deployment to S3.

Reconciles a bucket configured for website hosting with a local
build output directory: uploads new and changed files, deletes
orphans, and attaches content-type and cache-control metadata.
"""

__version__ = "0.3.0"
