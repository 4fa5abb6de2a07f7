"""
Module: bot/commands/messages.py

User-facing message templates. The wording is part of the bot's contract
with its users; change it here only.
"""

# Shared
GENERIC_ERROR = "명령어 실행 중 오류가 발생했습니다."
DISPATCH_ERROR = "요청 수행 중 오류가 발생했습니다!"

# /닉네임
INVALID_CHANNEL = "❌ **유효하지 않은 채널 ID입니다.**\n올바른 채널 ID를 입력해주세요."
CHANNEL_PERMISSION_MISSING = "❌ **채널 권한 부족**\n**{channel}** 채널에 메시지를 보낼 권한이 없습니다."
NICKNAME_SETUP_DONE = "✅ **닉네임 변경 버튼 설정 완료**\n**{channel}** 채널에 닉네임 변경 버튼을 설정했습니다."

# /구직
RECRUITMENT_DENIED = (
    "❌ **구인구직 기능 접근 권한이 없습니다.**\n\n"
    "이 기능은 현재 베타 테스트 중으로 특정 사용자와 관리자만 이용할 수 있습니다."
)
UNKNOWN_RECRUITMENT_TYPE = "❌ 알 수 없는 구인구직 유형입니다."

# /gap_save
ACTIVITY_SAVED = "활동 데이터가 최신화되었습니다."
ACTIVITY_SAVE_FAILED = "활동 데이터 저장 중 오류가 발생했습니다."

# Nickname prefix buttons
FEATURE_DENIED = "❌ 이 기능을 사용할 권한이 없습니다."
VOICE_CHANNEL_NOT_FOUND = "❌ 음성 채널을 찾을 수 없습니다."
MEMBER_REQUIRED = "❌ 서버 안에서만 사용할 수 있습니다."
NICKNAME_CHANGE_FAILED = "❌ 닉네임 변경에 실패했습니다."
MANUAL_CHANGE_HINT = "💡 수동으로 닉네임을 \"{nickname}\"로 변경해주세요."
MODE_SET = {
    "spectate": "👁️ 관전 모드로 설정되었습니다!",
    "wait": "⏳ 대기 모드로 설정되었습니다!",
    "reset": "🔄 원래 닉네임으로 복원되었습니다!",
}
MODE_UNCHANGED = {
    "spectate": "👁️ 이미 관전 모드로 설정되어 있습니다.",
    "wait": "⏳ 이미 대기 모드로 설정되어 있습니다.",
    "reset": "🔄 이미 정상 모드입니다.",
}
