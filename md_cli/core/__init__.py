"""
Core application engine.

The `DownloadManager` coordinates a session: `InfoJsonProbe` fetches the
metadata, `PromptFlow` turns the user's answers into a download intent and
`CommandRunner` executes the assembled yt-dlp command.
"""
