from pathlib import Path

from confstore import ConfigStore, NoSuchKey, exit_on_config_error

SAMPLE_FILE = Path(__file__).parent / "service.json"


@exit_on_config_error()
def main():
    # Step 1: Load the configuration file
    config = ConfigStore.load(SAMPLE_FILE)
    config.debug()

    # Step 2: Mandatory settings, a missing or malformed value aborts startup
    name = config.get_required_string("name")
    port = config.get_required_uint64("port")
    hosts = config.get_required_string_slice("hosts")
    print(f"{name} listening on {port}, peers: {', '.join(hosts)}")

    # Step 3: Optional settings with a fallback
    try:
        timeout = config.get_int64("timeout_s")
    except NoSuchKey:
        timeout = 30
    print("workers", config.get_int64("workers"), "timeout", timeout)

    # Step 4: Nested sections share the same accessors
    database = config.get_required_sub_config("database")
    pool = database.get_sub_config("pool")
    print("db", database.get_string("host"), database.get_uint64("port"), "pool max", pool.get_int64("max"))

    # Step 5: Modify and write back
    config.set("port", 9090)
    config.dump(Path(__file__).parent / "saved_service.json")

    # Step 6: This one is not present, so the process exits with status 1
    config.get_required_string("api_token")


if __name__ == "__main__":
    main()
