from __future__ import annotations

# Embedded subset used when there is no fresh cache and no successful remote refresh.
FALLBACK_USERNAMES: tuple[str, ...] = (
    "admin", "administrator", "root", "api", "www", "mail", "email",
    "support", "help", "info", "contact", "about", "blog", "news",
    "forum", "shop", "store", "account", "login", "register", "signup",
    "signin", "logout", "profile", "user", "users", "member", "members",
    "guest", "public", "private", "secure", "config", "settings",
    "dashboard", "panel", "ftp", "ssh", "ssl", "http", "https",
    "subdomain", "domain", "host", "server", "database", "db",
    "test", "testing", "dev", "development", "staging", "production",
    "backup", "cache", "tmp", "temp", "log", "logs", "error", "errors",
)
