from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from loguru import logger

from advert_alerts.config import get_settings
from advert_alerts.scheduler.jobs import check_expiring_adverts, update_remaining_days

# Jobs that may also be triggered by hand from the CLI or the admin API
JOBS = {
    "update_remaining_days": update_remaining_days,
    "check_expiring_adverts": check_expiring_adverts,
}


def create_scheduler() -> BackgroundScheduler:
    settings = get_settings()
    scheduler = BackgroundScheduler()

    # 每日 00:01 更新剩餘天數
    scheduler.add_job(
        update_remaining_days,
        CronTrigger(
            hour=settings.remaining_days_hour,
            minute=settings.remaining_days_minute,
        ),
        id="update_remaining_days",
        name="Update Remaining Days",
    )

    # 每日 09:00 通知明天到期的廣告
    scheduler.add_job(
        check_expiring_adverts,
        CronTrigger(
            hour=settings.expiry_check_hour,
            minute=settings.expiry_check_minute,
        ),
        id="check_expiring_adverts",
        name="Check Expiring Adverts",
    )

    logger.info("Scheduler configured with jobs")
    return scheduler


def start_scheduler():
    scheduler = create_scheduler()
    scheduler.start()
    logger.info("Scheduler started")
    return scheduler
