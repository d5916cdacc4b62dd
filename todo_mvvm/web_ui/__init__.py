"""NiceGUI web runtime: shared ``WebRuntime`` plus the page builder in ``main``."""
