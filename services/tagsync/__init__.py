"""
tagsync - push Obsidian daily note front matter tags into InfluxDB.
"""
