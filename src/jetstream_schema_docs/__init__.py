"""Markdown attribute reference generator for Terraform provider schemas."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
