import os
import sys

from chimpfields import ChimpClient, ClientConfig


def get_list_id(env_file="notebooks/.env"):
    config = ClientConfig.from_env(env_file)
    list_id = os.getenv("MAILCHIMP_LIST_ID")
    return config, list_id


if __name__ == "__main__":
    config, list_id = get_list_id()
    if not list_id:
        sys.exit("MAILCHIMP_LIST_ID is not set.")
    with ChimpClient(config) as my_client:
        print(f"Health: {my_client.ping()}")
        df_overview = my_client.merge_fields.overview(list_id)
        print(df_overview)
        print(f"Data center: {config.data_center}, List: {list_id}")
