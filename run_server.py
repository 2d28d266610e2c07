#!/usr/bin/env python
"""Development server entrypoint for the VaultFlow API."""

from vaultflow import create_app

app = create_app("development")

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["VAULTFLOW_CONFIG"].PORT)
