"""
Module: bot/commands

Package initializer for the commands module. Each command module exposes
NAME and a build(services) factory returning a CommandSpec; bot_context
registers them with the bot.
"""
