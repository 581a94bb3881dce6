from email_pgp.cli import main

main()
