"""RoadAnalysis bundled word lists.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""
