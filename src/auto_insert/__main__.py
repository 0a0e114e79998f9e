from auto_insert import cli

if __name__ == "__main__":
    cli.app()
