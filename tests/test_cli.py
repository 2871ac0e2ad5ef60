def test_db_init_and_seed(make_app):
    app, _ = make_app()
    runner = app.test_cli_runner()

    init = runner.invoke(args=["db", "init"])
    seed = runner.invoke(args=["db", "seed", "--customers", "3"])
    again = runner.invoke(args=["db", "seed", "--customers", "1"])

    assert init.exit_code == 0
    assert "Initialized database" in init.output
    assert seed.exit_code == 0
    assert "Seeded 3 customer(s)" in seed.output
    assert again.exit_code == 0

    customers = app.test_client().get("/customers").get_json()
    users = app.test_client().get("/users").get_json()

    assert [c["name"] for c in customers] == [
        "Customer 1",
        "Customer 2",
        "Customer 3",
        "Customer 1",
    ]
    assert len(users) == 1
