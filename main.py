#!/usr/bin/env python3

import sys
import os

# Ensure src directory is in path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

# Android entry point (python-for-android runs this file)
if __name__ == "__main__":
    # Set Android environment flag
    os.environ["ANDROID_BUILD"] = "1"

    if hasattr(sys, "getandroidapilevel") or "ANDROID_ARGUMENT" in os.environ:
        try:
            from android.storage import app_storage_path

            # Must be set before constants is imported
            os.environ["ANDROID_STORAGE"] = app_storage_path()
        except ImportError:
            print("android.storage unavailable, using script directory")

    from utils.platform import request_storage_permissions

    request_storage_permissions()

    # Import and run the main application
    from app import main

    main()
