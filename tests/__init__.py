"""Test-suite for zipstamp."""
