"""
Core application engine for orchestrating an install run.

The `InstallManager` loads the recipe and the profile registry, resolves the
installation root once, and hands every category to the `Installer`, which
skips items already on disk and fetches the rest one at a time.
"""
