"""Test suite package marker so nested test modules import under qualified names."""
