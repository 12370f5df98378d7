"""
URL classification.

Strict parsing of normalized candidates into structured URL fields.
"""

from .url_classifier import ClassifiedURL, URLClassifier, domain_to_tld, hostname_to_domain

__all__ = ["URLClassifier", "ClassifiedURL", "hostname_to_domain", "domain_to_tld"]
