"""
PrintNode CLI

Command-line interface for the PrintNode API client.

Usage:
    python -m printnode_cli get Computers
    python -m printnode_cli get PrintersByComputers 12
    python -m printnode_cli states 1234
    python -m printnode_cli client-key <uuid> <edition> <version>
    python -m printnode_cli delete-tag <name>
"""

__version__ = "0.1.0"
