"""Pure fingerprint derivation."""
