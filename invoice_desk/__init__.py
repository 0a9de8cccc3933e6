"""
Invoice Desk - Local Data-Service Layer

An in-process stand-in for an invoicing backend: clients, invoices and
the signed-in session persisted to a local key/value store.

DESIGN PRINCIPLES:
1. Storage is an injected port, never a global
2. Client and invoice data expire after a rolling inactivity window
3. The session outlives that window until explicit logout
4. totalAmount is a snapshot taken at save time
5. Reads degrade to "no data"; writes fail loudly
"""

__version__ = "1.0.0"
__author__ = "Invoice Desk Team"
