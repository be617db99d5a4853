"""
打卡统计引擎

纯函数：输入全部按日期记录的打卡观测值和"今天"，输出 StatisticsReport。
不读写数据库，不依赖当前时间，相同输入总是得到相同结果。
"""
from datetime import date, datetime, timedelta
from typing import Iterable, Mapping, Optional, Tuple, Union

from models import Observation, StatisticsReport

DATE_FORMAT = "%Y-%m-%d"
ONE_DAY = timedelta(days=1)

DateLike = Union[date, str]

class InvalidDateError(ValueError):
    """日期不是合法的 YYYY-MM-DD 日历日"""

def parse_day(value: DateLike) -> date:
    """把 date 或 YYYY-MM-DD 字符串转换为 date"""
    if isinstance(value, datetime):
        raise InvalidDateError(f"需要日历日而不是时间点: {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"无效的日期: {value!r}")
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(f"无效的日期: {value!r}") from exc
    # strptime 接受 2024-1-1 这种写法，这里只认规范格式
    if parsed.isoformat() != value:
        raise InvalidDateError(f"日期格式必须为 YYYY-MM-DD: {value!r}")
    return parsed

def percentage(part: int, whole: int) -> int:
    """四舍五入（0.5 进位）的整数百分比，分母为 0 时返回 0"""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)

def current_streak(worked: frozenset, today: date) -> Tuple[int, Optional[date]]:
    """从今天（今天未打卡则从昨天）往前数连续打卡天数"""
    cursor = today if today in worked else today - ONE_DAY
    count = 0
    start = None
    while cursor in worked:
        count += 1
        start = cursor
        cursor -= ONE_DAY
    return count, start

def longest_streak(sorted_days: list) -> Tuple[int, Optional[date], Optional[date]]:
    """历史最长连续打卡，长度相同时取最早的一段"""
    if not sorted_days:
        return 0, None, None

    best = 1
    best_start = best_end = sorted_days[0]
    run = 1
    run_start = sorted_days[0]

    for prev, day in zip(sorted_days, sorted_days[1:]):
        if (day - prev).days == 1:
            run += 1
            continue
        if run > best:
            best, best_start, best_end = run, run_start, prev
        run = 1
        run_start = day

    if run > best:
        best, best_start, best_end = run, run_start, sorted_days[-1]

    return best, best_start, best_end

def month_counts(worked: frozenset, today: date) -> Tuple[int, int]:
    """本月1号到今天（含）的打卡天数和总天数"""
    month_start = today.replace(day=1)
    days = (today - month_start).days + 1
    hits = sum(1 for d in worked if month_start <= d <= today)
    return hits, days

def _worked_days(observations: Mapping[DateLike, Observation]) -> Iterable[date]:
    seen = set()
    for key, observation in observations.items():
        day = parse_day(key)
        if day in seen:
            raise InvalidDateError(f"同一天出现重复记录: {day.isoformat()}")
        seen.add(day)
        if observation.worked_out:
            yield day

def compute(observations: Mapping[DateLike, Observation], today: DateLike) -> StatisticsReport:
    """计算打卡统计

    observations 中没有的日期与 worked_out=False 等价。
    """
    today = parse_day(today)
    sorted_days = sorted(_worked_days(observations))
    worked = frozenset(sorted_days)

    month_hits, month_days = month_counts(worked, today)

    if not sorted_days:
        return StatisticsReport(month_percentage=percentage(month_hits, month_days))

    streak, streak_start = current_streak(worked, today)
    longest, longest_start, longest_end = longest_streak(sorted_days)

    first_day = sorted_days[0]
    # 首次打卡在今天之后时没有已过去的天数
    days_passed = max((today - first_day).days + 1, 0)

    return StatisticsReport(
        current_streak=streak,
        current_streak_start=streak_start,
        longest_streak=longest,
        longest_streak_start=longest_start,
        longest_streak_end=longest_end,
        total_workouts=len(sorted_days),
        first_workout_date=first_day,
        total_days_passed=days_passed,
        all_time_percentage=percentage(len(sorted_days), days_passed),
        month_percentage=percentage(month_hits, month_days),
    )
