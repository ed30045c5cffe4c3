from apps.sample.sample_client import main

main()
