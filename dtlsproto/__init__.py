"""DTLS message types (alert, change cipher spec, application data, compression methods) and cipher suite definitions."""

__version__ = "0.1.0"
__all__ = [
    "alert",
    "application_data",
    "change_cipher_spec",
    "cipher_suite",
    "client_certificate_type",
    "compression_methods",
    "errors",
]