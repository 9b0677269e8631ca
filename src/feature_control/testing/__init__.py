"""Testing – fakes and property-based strategies for feature resolution."""
