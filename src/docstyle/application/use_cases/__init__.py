"""Use cases orchestrating the parser, validator and report builder."""
