# === ./bot/config.py === #
import os
from dotenv import load_dotenv
from permissions import CommandPolicy
from utils import parse_id_list, parse_name_list, parse_role_map, set_log_level

load_dotenv()

GUILD_IDS = parse_id_list(os.getenv("GUILD_IDS", ""))
GUILD_MODE = bool(GUILD_IDS)

DISCORD_BOT_TOKEN = os.getenv('DISCORD_BOT_TOKEN')
DISCORD_APPLICATION_ID = os.getenv('DISCORD_APPLICATION_ID')

if not DISCORD_BOT_TOKEN or not DISCORD_APPLICATION_ID:
    raise EnvironmentError("Missing DISCORD_BOT_TOKEN or DISCORD_APPLICATION_ID in .env file")

# `module:callable` returning a services.Services bundle
SERVICE_FACTORY = os.getenv('SERVICE_FACTORY')

if not SERVICE_FACTORY:
    raise EnvironmentError("Missing SERVICE_FACTORY in .env file")

LOG_LEVEL = os.getenv('LOG_LEVEL', 'info')
set_log_level(LOG_LEVEL)

# Role policy for slash commands
SUPER_ADMIN_ROLES = tuple(parse_name_list(os.getenv('SUPER_ADMIN_ROLES', '관리자,봇관리자')))
PUBLIC_COMMANDS = tuple(parse_name_list(os.getenv('PUBLIC_COMMANDS', '구직')))
COMMAND_ROLES = parse_role_map(os.getenv('COMMAND_ROLES', 'gap_save=서버관리자;닉네임=서버관리자'))
DEV_USER_ID = int(os.getenv('DEV_USER_ID', '0')) or None

COMMAND_POLICY = CommandPolicy(
    super_admin_roles=SUPER_ADMIN_ROLES,
    public_commands=PUBLIC_COMMANDS,
    role_permissions=COMMAND_ROLES,
    dev_user_id=DEV_USER_ID,
)
