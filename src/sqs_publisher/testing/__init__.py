"""Testing utilities – fakes and property-based strategies for publisher tests."""
