"""podcastdir - browse the iTunes podcast directory from the terminal.

Lists the top podcasts, shows a podcast's episodes and an episode's
details, with a local TTL cache in front of the directory API.

Example:
    from podcastdir.config.schema import GlobalConfig
    from podcastdir.container import build_service

    async with build_service(GlobalConfig()) as service:
        podcasts = await service.get_top_podcasts()
        matches = service.filter_podcasts(podcasts, "jazz")
"""

__version__ = "0.1.0"
