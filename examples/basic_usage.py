import asyncio

from reserved_usernames import ReservedUsernames, check_bulk


async def main() -> None:
    registry = await ReservedUsernames.create(
        custom_reserved=["myapp", "mycompany", "reserved123"],
        auto_update=True,
    )
    registry.subscribe("fetch_error", lambda p: print("remote refresh failed, using local list:", p["error"]))

    print('Is "admin" reserved?', registry.is_reserved("admin"))
    print('Is "john" reserved?', registry.is_reserved("john"))

    for result in registry.check_multiple(["admin", "user", "john", "api", "contact"]):
        print(f"{result.username}: {'RESERVED' if result.is_reserved else 'available'}")

    stats = registry.get_stats()
    print(f"total={stats.total} shortest={stats.shortest} longest={stats.longest} average={stats.average}")

    print("containing 'admin':", registry.get_by_pattern("admin")[:5])
    print("starting with 'mail':", registry.get_by_prefix("mail"))
    print("alternatives for 'admin':", registry.suggest_alternatives("admin", 3))

    rules = {"min_length": 3, "max_length": 20, "allowed_chars": "a-zA-Z0-9_", "forbidden_patterns": ["test", "demo"]}
    for name in ["admin", "jo", "validuser123", "test_user", "demo"]:
        v = registry.validate_username(name, rules)
        print(f"{name}: {'VALID' if v.is_valid else 'INVALID ' + ', '.join(v.errors)}")

    big = [f"user{i}" for i in range(5000)] + ["admin"]
    results = await check_bulk(registry, big, batch_size=1000)
    print("reserved in bulk list:", [r.username for r in results if r.is_reserved])


if __name__ == "__main__":
    asyncio.run(main())
