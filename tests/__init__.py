"""E4C staking scripts tests."""
