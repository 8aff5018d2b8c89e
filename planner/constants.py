APP_TITLE = "タスク管理アプリ"

WEEKDAY_LABELS = ["日", "月", "火", "水", "木", "金", "土"]
WEEKDAY_COLORS = {0: "#ef4444", 6: "#3b82f6"}

TAGS = ["work", "private", "study", "other"]
TAG_LABELS = {
    "work": "仕事",
    "private": "プライベート",
    "study": "勉強",
    "other": "その他",
}
TAG_COLORS = {
    "work": "#3b82f6",
    "private": "#22c55e",
    "study": "#a855f7",
    "other": "#6b7280",
}

VIEW_CALENDAR = "calendar"
VIEW_SCHEDULE = "schedule"
VIEW_TENNIS = "tennis"
VIEW_OPTIONS = [VIEW_CALENDAR, VIEW_SCHEDULE, VIEW_TENNIS]
VIEW_LABELS = {
    VIEW_CALENDAR: "📅 カレンダー",
    VIEW_SCHEDULE: "📋 スケジュール",
    VIEW_TENNIS: "🎾 テニス",
}

GOAL_PLACEHOLDER = "目標を設定しましょう"
DEFAULT_TASK_TIME = "09:00"

TAG_EMOJI = {
    "work": "🔵",
    "private": "🟢",
    "study": "🟣",
    "other": "⚪",
}
STAMP_EMOJI = "⭐"
