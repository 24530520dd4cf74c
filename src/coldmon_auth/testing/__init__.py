"""Testing – pytest fixtures and hypothesis strategies for services using coldmon_auth."""
