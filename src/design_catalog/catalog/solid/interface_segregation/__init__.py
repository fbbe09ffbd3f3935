"""Interface Segregation Principle: printers, scanners and fax machines."""
