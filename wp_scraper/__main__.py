from wp_scraper.cli import main

main()
