"""An API serving Microsoft Fabric User Data Function samples."""
