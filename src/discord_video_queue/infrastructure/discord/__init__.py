"""Discord integration - bot, cogs, guards and the channel notifier."""
