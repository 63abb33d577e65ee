import os
import shutil
import logging

from config import CACHE_NAME, ASSET_MANIFEST

logger = logging.getLogger(__name__)


class AssetCache:
    """Local mirror of the game's static assets.

    ``install`` copies the manifest into a versioned cache directory the first
    time it runs; ``resolve`` serves a cached copy when there is one and falls
    back to the source directory otherwise.
    """

    def __init__(self, source_dir, cache_root, name=CACHE_NAME, manifest=ASSET_MANIFEST):
        self.source_dir = source_dir
        self.cache_dir = os.path.join(cache_root, name)
        self.manifest = list(manifest)

    @property
    def installed(self):
        return os.path.isdir(self.cache_dir)

    def install(self):
        """Populate the cache on first activation. Returns the names copied."""
        if self.installed:
            return []

        try:
            os.makedirs(self.cache_dir)
        except OSError as e:
            logger.warning("Cannot create asset cache %s: %s", self.cache_dir, e)
            return []

        copied = []
        for name in self.manifest:
            src = os.path.join(self.source_dir, name)
            if not os.path.isfile(src):
                logger.warning("Asset %s missing from %s, not cached", name, self.source_dir)
                continue
            try:
                shutil.copy2(src, os.path.join(self.cache_dir, name))
            except OSError as e:
                logger.warning("Failed to cache %s: %s", name, e)
                continue
            copied.append(name)

        logger.info("Asset cache %s installed (%d/%d files)", self.cache_dir, len(copied), len(self.manifest))
        return copied

    def resolve(self, name):
        cached = os.path.join(self.cache_dir, name)
        if os.path.isfile(cached):
            return cached
        return os.path.join(self.source_dir, name)
