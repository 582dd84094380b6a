"""BitBadges MCP server.

Generated by ``python -m generator`` from the BitBadges OpenAPI spec
(version v0, 106 tools). Do not edit by hand;
re-run the generator instead.
"""

from __future__ import annotations

from typing import Any

from bitbadges_mcp.gateway import Gateway, Handler, path_arg, query_args
from bitbadges_mcp.server import main

TOOLS: list[dict[str, Any]] = [{'name': 'bitbadges_configure',
  'description': 'Configure the BitBadges API key and base URL',
  'inputSchema': {'type': 'object',
                  'properties': {'apiKey': {'type': 'string',
                                            'description': 'Your BitBadges API key from the '
                                                           'developer portal'},
                                 'baseUrl': {'type': 'string',
                                             'description': 'Base URL for the BitBadges API '
                                                            '(optional, defaults to '
                                                            'https://api.bitbadges.io)'}},
                  'required': ['apiKey']}},
 {'name': 'bitbadges_getAccount',
  'description': 'Get Account',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'address parameter'},
                                 'username': {'type': 'string',
                                              'description': 'username parameter'}},
                  'required': []},
  'metadata': {'path': '/user',
               'method': 'GET',
               'operationId': 'getAccount',
               'tags': ['Accounts'],
               'queryParameters': ['address', 'username']}},
 {'name': 'bitbadges_getAccounts',
  'description': 'Get Accounts - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetAccountsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/users',
               'method': 'POST',
               'operationId': 'getAccounts',
               'tags': ['Accounts'],
               'queryParameters': []}},
 {'name': 'bitbadges_getCollection',
  'description': 'Get Collection',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string',
                                                  'description': 'Collection ID'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}',
               'method': 'GET',
               'operationId': 'getCollection',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getBadgeMetadata',
  'description': 'Get Badge Metadata',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'badgeId': {'type': 'string', 'description': 'Badge ID'}},
                  'required': ['collectionId', 'badgeId']},
  'metadata': {'path': '/collection/{collectionId}/{badgeId}/metadata',
               'method': 'GET',
               'operationId': 'getBadgeMetadata',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getCollectionsBatch',
  'description': 'Get Collections - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetCollectionsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/collections',
               'method': 'POST',
               'operationId': 'getCollectionsBatch',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getBadgeBalanceByAddressSpecificBadge',
  'description': 'Get Badge Balance By Address - Specific Badge',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'integer',
                                                  'description': 'The ID of the collection '
                                                                 'containing the badge.'},
                                 'address': {'type': 'string',
                                             'description': 'The address for which the badge '
                                                            'balance is to be retrieved. Can be '
                                                            '"Total" for the circulating supply.'},
                                 'badgeId': {'type': 'integer',
                                             'description': 'The ID of the badge for which the '
                                                            'balance is to be retrieved.'}},
                  'required': ['collectionId', 'address', 'badgeId']},
  'metadata': {'path': '/collection/{collectionId}/balance/{address}/{badgeId}',
               'method': 'GET',
               'operationId': 'getBadgeBalanceByAddressSpecificBadge',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getBadgeBalanceByAddress',
  'description': 'Get Badge Balances By Address',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'integer',
                                                  'description': 'The ID of the collection '
                                                                 'containing the badge.'},
                                 'address': {'type': 'string',
                                             'description': 'The address for which the badge '
                                                            'balance is to be retrieved. Can be '
                                                            '"Total" for the circulating supply.'},
                                 'fetchPrivateParams': {'type': 'boolean',
                                                        'description': 'fetchPrivateParams '
                                                                       'parameter'},
                                 'forceful': {'type': 'boolean',
                                              'description': 'forceful parameter'}},
                  'required': ['collectionId', 'address']},
  'metadata': {'path': '/collection/{collectionId}/balance/{address}',
               'method': 'GET',
               'operationId': 'getBadgeBalanceByAddress',
               'tags': ['Badges'],
               'queryParameters': ['fetchPrivateParams', 'forceful']}},
 {'name': 'bitbadges_getClaim',
  'description': 'Get Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string', 'description': 'Claim ID'},
                                 'fetchPrivateParams': {'type': 'boolean',
                                                        'description': 'fetchPrivateParams '
                                                                       'parameter'},
                                 'fetchAllClaimedUsers': {'type': 'boolean',
                                                          'description': 'fetchAllClaimedUsers '
                                                                         'parameter'},
                                 'privateStatesToFetch': {'type': 'array',
                                                          'description': 'privateStatesToFetch '
                                                                         'parameter'}},
                  'required': ['claimId']},
  'metadata': {'path': '/claim/{claimId}',
               'method': 'GET',
               'operationId': 'getClaim',
               'tags': ['Claims'],
               'queryParameters': ['fetchPrivateParams',
                                   'fetchAllClaimedUsers',
                                   'privateStatesToFetch']}},
 {'name': 'bitbadges_checkClaimSuccess',
  'description': 'Check Claim Successes By User',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string', 'description': 'claimId parameter'},
                                 'address': {'type': 'string', 'description': 'address parameter'}},
                  'required': ['claimId', 'address']},
  'metadata': {'path': '/claims/success/{claimId}/{address}',
               'method': 'GET',
               'operationId': 'checkClaimSuccess',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAttestation',
  'description': 'Get Attestation',
  'inputSchema': {'type': 'object',
                  'properties': {'attestationId': {'type': 'string',
                                                   'description': 'Attestation ID'}},
                  'required': ['attestationId']},
  'metadata': {'path': '/attestation/{attestationId}',
               'method': 'GET',
               'operationId': 'getAttestation',
               'tags': ['Attestations'],
               'queryParameters': []}},
 {'name': 'bitbadges_getDeveloperApp',
  'description': 'Get OAuth App',
  'inputSchema': {'type': 'object',
                  'properties': {'clientId': {'type': 'string', 'description': 'Client ID'}},
                  'required': ['clientId']},
  'metadata': {'path': '/developerApp/{clientId}',
               'method': 'GET',
               'operationId': 'getDeveloperApp',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_createDeveloperApp',
  'description': 'Create OAuth App',
  'inputSchema': {'type': 'object', 'properties': {}, 'required': []},
  'metadata': {'path': '/developerApps',
               'method': 'POST',
               'operationId': 'createDeveloperApp',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateDeveloperApp',
  'description': 'Update OAuth App',
  'inputSchema': {'type': 'object',
                  'properties': {'clientId': {'type': 'string', 'description': 'Client ID'}},
                  'required': ['clientId']},
  'metadata': {'path': '/developerApps',
               'method': 'PUT',
               'operationId': 'updateDeveloperApp',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': ['clientId']}},
 {'name': 'bitbadges_deleteDeveloperApp',
  'description': 'Delete OAuth App',
  'inputSchema': {'type': 'object',
                  'properties': {'clientId': {'type': 'string', 'description': 'Client ID'}},
                  'required': ['clientId']},
  'metadata': {'path': '/developerApps',
               'method': 'DELETE',
               'operationId': 'deleteDeveloperApp',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': ['clientId']}},
 {'name': 'bitbadges_getPlugin',
  'description': 'Get Plugin',
  'inputSchema': {'type': 'object',
                  'properties': {'pluginId': {'type': 'string', 'description': 'Plugin ID'}},
                  'required': ['pluginId']},
  'metadata': {'path': '/plugin/{pluginId}',
               'method': 'GET',
               'operationId': 'getPlugin',
               'tags': ['Plugins'],
               'queryParameters': []}},
 {'name': 'bitbadges_getUtilityListing',
  'description': 'Get Utility Listing',
  'inputSchema': {'type': 'object',
                  'properties': {'utilityListingId': {'type': 'string',
                                                      'description': 'Utility listing ID'}},
                  'required': ['utilityListingId']},
  'metadata': {'path': '/utilityListing/{utilityListingId}',
               'method': 'GET',
               'operationId': 'getUtilityListing',
               'tags': ['Utility Listings'],
               'queryParameters': []}},
 {'name': 'bitbadges_getDynamicDataStore',
  'description': 'Get Dynamic Data Store',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicStoreId': {'type': 'string',
                                                    'description': 'Dynamic data store ID'},
                                 'dataSecret': {'type': 'string',
                                                'description': 'dataSecret parameter'}},
                  'required': ['dynamicStoreId']},
  'metadata': {'path': '/dynamicStore/{dynamicStoreId}',
               'method': 'GET',
               'operationId': 'getDynamicDataStore',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['dataSecret']}},
 {'name': 'bitbadges_getDynamicDataStoreValue',
  'description': 'Get Dynamic Data Store Value',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicStoreId': {'type': 'string',
                                                    'description': 'Dynamic data store ID'},
                                 'key': {'type': 'string', 'description': 'key parameter'},
                                 'dataSecret': {'type': 'string',
                                                'description': 'dataSecret parameter'},
                                 'lookupType': {'type': 'string',
                                                'description': 'lookupType parameter'}},
                  'required': ['dynamicStoreId', 'key']},
  'metadata': {'path': '/dynamicStore/{dynamicStoreId}/value',
               'method': 'GET',
               'operationId': 'getDynamicDataStoreValue',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['key', 'dataSecret', 'lookupType']}},
 {'name': 'bitbadges_getDynamicDataStoreValuesPaginated',
  'description': 'Get Dynamic Data Store Values Paginated',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicStoreId': {'type': 'string',
                                                    'description': 'Dynamic data store ID'},
                                 'dataSecret': {'type': 'string',
                                                'description': 'dataSecret parameter'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'lookupType': {'type': 'string',
                                                'description': 'lookupType parameter'}},
                  'required': ['dynamicStoreId']},
  'metadata': {'path': '/dynamicStore/{dynamicStoreId}/values',
               'method': 'GET',
               'operationId': 'getDynamicDataStoreValuesPaginated',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['dataSecret', 'bookmark', 'lookupType']}},
 {'name': 'bitbadges_createDynamicDataStore',
  'description': 'Create Dynamic Data Store',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateDynamicDataStorePayload'}},
                  'required': ['body']},
  'metadata': {'path': '/dynamicStores',
               'method': 'POST',
               'operationId': 'createDynamicDataStore',
               'tags': ['Dynamic Stores'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateDynamicDataStore',
  'description': 'Update Dynamic Data Store',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicStoreId': {'type': 'string',
                                                    'description': 'Dynamic data store ID'},
                                 'body': {'$ref': '#/components/schemas/iUpdateDynamicDataStorePayload'}},
                  'required': ['dynamicStoreId', 'body']},
  'metadata': {'path': '/dynamicStores',
               'method': 'PUT',
               'operationId': 'updateDynamicDataStore',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['dynamicStoreId']}},
 {'name': 'bitbadges_deleteDynamicDataStore',
  'description': 'Delete Dynamic Data Store',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicStoreId': {'type': 'string',
                                                    'description': 'Dynamic data store ID'},
                                 'body': {'$ref': '#/components/schemas/iDeleteDynamicDataStorePayload'}},
                  'required': ['dynamicStoreId', 'body']},
  'metadata': {'path': '/dynamicStores',
               'method': 'DELETE',
               'operationId': 'deleteDynamicDataStore',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['dynamicStoreId']}},
 {'name': 'bitbadges_getApplication',
  'description': 'Get Application',
  'inputSchema': {'type': 'object',
                  'properties': {'applicationId': {'type': 'string',
                                                   'description': 'Application ID'}},
                  'required': ['applicationId']},
  'metadata': {'path': '/application/{applicationId}',
               'method': 'GET',
               'operationId': 'getApplication',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAddressList',
  'description': 'Get Address List',
  'inputSchema': {'type': 'object',
                  'properties': {'addressListId': {'type': 'string',
                                                   'description': 'Address list ID'}},
                  'required': ['addressListId']},
  'metadata': {'path': '/addressList/{addressListId}',
               'method': 'GET',
               'operationId': 'getAddressList',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_getStatus',
  'description': 'Get Status',
  'inputSchema': {'type': 'object',
                  'properties': {'withOutOfSyncCheck': {'type': 'boolean',
                                                        'description': 'withOutOfSyncCheck '
                                                                       'parameter'}},
                  'required': []},
  'metadata': {'path': '/status',
               'method': 'GET',
               'operationId': 'getStatus',
               'tags': ['Miscellanous'],
               'queryParameters': ['withOutOfSyncCheck']}},
 {'name': 'bitbadges_getOwnersForBadge',
  'description': 'Get Badge Owners',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'integer',
                                                  'description': 'The numeric collection ID.'},
                                 'badgeId': {'type': 'integer',
                                             'description': 'The numeric badge ID to retrieve '
                                                            'owners for.'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'sortBy': {'type': 'string', 'description': 'sortBy parameter'}},
                  'required': ['collectionId', 'badgeId']},
  'metadata': {'path': '/collection/{collectionId}/{badgeId}/owners',
               'method': 'GET',
               'operationId': 'getOwnersForBadge',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'sortBy']}},
 {'name': 'bitbadges_getBadgeActivity',
  'description': 'Get Badge Activity',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'integer',
                                                  'description': 'The ID of the collection '
                                                                 'containing the badge.'},
                                 'badgeId': {'type': 'integer',
                                             'description': 'The ID of the badge for which '
                                                            'activity is to be retrieved.'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'bitbadgesAddress': {'type': 'string',
                                                      'description': 'bitbadgesAddress parameter'}},
                  'required': ['collectionId', 'badgeId']},
  'metadata': {'path': '/collection/{collectionId}/{badgeId}/activity',
               'method': 'GET',
               'operationId': 'getBadgeActivity',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'bitbadgesAddress']}},
 {'name': 'bitbadges_completeClaim',
  'description': 'Complete Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string',
                                             'description': 'The ID of the claim.'},
                                 'address': {'type': 'string',
                                             'description': 'The address of the user making the '
                                                            'claim.'},
                                 'body': {'$ref': '#/components/schemas/iCompleteClaimPayload'}},
                  'required': ['claimId', 'address', 'body']},
  'metadata': {'path': '/claims/complete/{claimId}/{address}',
               'method': 'POST',
               'operationId': 'completeClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_simulateClaim',
  'description': 'Simulate Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string',
                                             'description': 'The ID of the claim.'},
                                 'address': {'type': 'string',
                                             'description': 'The address of the user making the '
                                                            'claim.'},
                                 'body': {'$ref': '#/components/schemas/iSimulateClaimPayload'}},
                  'required': ['claimId', 'address', 'body']},
  'metadata': {'path': '/claims/simulate/{claimId}/{address}',
               'method': 'POST',
               'operationId': 'simulateClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_getReservedCodes',
  'description': 'Get Reserved Claim Codes',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string',
                                             'description': 'The ID of the claim.'},
                                 'address': {'type': 'string',
                                             'description': 'The address of the user making the '
                                                            'claim.'},
                                 'body': {'$ref': '#/components/schemas/iGetReservedClaimCodesPayload'}},
                  'required': ['claimId', 'address', 'body']},
  'metadata': {'path': '/claims/reserved/{claimId}/{address}',
               'method': 'POST',
               'operationId': 'getReservedCodes',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_getClaimAttemptStatus',
  'description': 'Get Claim Attempt Status',
  'inputSchema': {'type': 'object',
                  'properties': {'claimAttemptId': {'type': 'string',
                                                    'description': 'The transaction ID of the '
                                                                   'claim attempt.'}},
                  'required': ['claimAttemptId']},
  'metadata': {'path': '/claims/status/{claimAttemptId}',
               'method': 'GET',
               'operationId': 'getClaimAttemptStatus',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_broadcastTx',
  'description': 'Broadcast Transaction',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'oneOf': [{'$ref': '#/components/schemas/iBroadcastTxPayload'},
                                                    {'type': 'string'}]}},
                  'required': ['body']},
  'metadata': {'path': '/broadcast',
               'method': 'POST',
               'operationId': 'broadcastTx',
               'tags': ['Transactions'],
               'queryParameters': []}},
 {'name': 'bitbadges_simulateTx',
  'description': 'Simulate Transaction',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'oneOf': [{'$ref': '#/components/schemas/iSimulateTxPayload'},
                                                    {'type': 'string'}]}},
                  'required': ['body']},
  'metadata': {'path': '/simulate',
               'method': 'POST',
               'operationId': 'simulateTx',
               'tags': ['Transactions'],
               'queryParameters': []}},
 {'name': 'bitbadges_createAddressLists',
  'description': 'Creates Address Lists',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateAddressListsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/addressLists',
               'method': 'POST',
               'operationId': 'createAddressLists',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteAddressLists',
  'description': 'Delete Address Lists',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteAddressListsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/addressLists',
               'method': 'DELETE',
               'operationId': 'deleteAddressLists',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateAddressListCoreDetails',
  'description': 'Update Address List Core Details',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateAddressListCoreDetailsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/addressLists/coreDetails',
               'method': 'PUT',
               'operationId': 'updateAddressListCoreDetails',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateAddressListAddresses',
  'description': 'Update Address List Addresses',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateAddressListAddressesPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/addressLists/addresses',
               'method': 'PUT',
               'operationId': 'updateAddressListAddresses',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAddressLists',
  'description': 'Get Address Lists - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetAddressListsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/addressLists/fetch',
               'method': 'POST',
               'operationId': 'getAddressLists',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_exchangeSIWBBAuthorizationCode',
  'description': 'Exchange SIWBB Code',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iExchangeSIWBBAuthorizationCodePayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbb/token',
               'method': 'POST',
               'operationId': 'exchangeSIWBBAuthorizationCode',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_revokeOauthAuthorization',
  'description': 'Revoke Authorization',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iOauthRevokePayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbb/token/revoke',
               'method': 'POST',
               'operationId': 'revokeOauthAuthorization',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_rotateSIWBBRequest',
  'description': 'Rotate SIWBB Request',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iRotateSIWBBRequestPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbbRequest/rotate',
               'method': 'POST',
               'operationId': 'rotateSIWBBRequest',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteSIWBBRequest',
  'description': 'Delete SIWBB Request',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteSIWBBRequestPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbbRequest',
               'method': 'DELETE',
               'operationId': 'deleteSIWBBRequest',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_createSIWBBRequest',
  'description': 'Create SIWBB Request',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateSIWBBRequestPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbbRequest',
               'method': 'POST',
               'operationId': 'createSIWBBRequest',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getSIWBBRequestsForDeveloperApp',
  'description': 'Get SIWBB Requests For Developer App',
  'inputSchema': {'type': 'object',
                  'properties': {'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'clientId': {'type': 'string',
                                              'description': 'clientId parameter'}},
                  'required': ['clientId']},
  'metadata': {'path': '/developerApps/siwbbRequests',
               'method': 'GET',
               'operationId': 'getSIWBBRequestsForDeveloperApp',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': ['bookmark', 'clientId']}},
 {'name': 'bitbadges_sendClaimAlert',
  'description': 'Sends Claim Alert',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iSendClaimAlertsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/claimAlerts/send',
               'method': 'POST',
               'operationId': 'sendClaimAlert',
               'tags': ['Claim Alerts'],
               'queryParameters': []}},
 {'name': 'bitbadges_getRefreshStatus',
  'description': 'Get Refresh Status',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string',
                                                  'description': 'The collection ID'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/refreshStatus',
               'method': 'GET',
               'operationId': 'getRefreshStatus',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getMap',
  'description': 'Get Map',
  'inputSchema': {'type': 'object',
                  'properties': {'mapId': {'type': 'string', 'description': 'The map ID'}},
                  'required': ['mapId']},
  'metadata': {'path': '/maps/{mapId}',
               'method': 'GET',
               'operationId': 'getMap',
               'tags': ['Maps and Protocols'],
               'queryParameters': []}},
 {'name': 'bitbadges_getMaps',
  'description': 'Get Maps - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetMapsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/maps',
               'method': 'POST',
               'operationId': 'getMaps',
               'tags': ['Maps and Protocols'],
               'queryParameters': []}},
 {'name': 'bitbadges_getMapValues',
  'description': 'Get Map Values - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetMapValuesPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/mapValues',
               'method': 'POST',
               'operationId': 'getMapValues',
               'tags': ['Maps and Protocols'],
               'queryParameters': []}},
 {'name': 'bitbadges_getMapValue',
  'description': 'Get Map Value',
  'inputSchema': {'type': 'object',
                  'properties': {'mapId': {'type': 'string', 'description': 'The map ID'},
                                 'key': {'type': 'string',
                                         'description': 'The key to get the value for'}},
                  'required': ['mapId', 'key']},
  'metadata': {'path': '/mapValue/{mapId}/{key}',
               'method': 'GET',
               'operationId': 'getMapValue',
               'tags': ['Maps and Protocols'],
               'queryParameters': []}},
 {'name': 'bitbadges_createAttestation',
  'description': 'Create Attestation',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateAttestationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/attestations',
               'method': 'POST',
               'operationId': 'createAttestation',
               'tags': ['Attestations'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateAttestation',
  'description': 'Update Attestation',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateAttestationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/attestations',
               'method': 'PUT',
               'operationId': 'updateAttestation',
               'tags': ['Attestations'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteAttestation',
  'description': 'Delete Attestation',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteAttestationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/attestations',
               'method': 'DELETE',
               'operationId': 'deleteAttestation',
               'tags': ['Attestations'],
               'queryParameters': []}},
 {'name': 'bitbadges_searchClaims',
  'description': 'Search Claims',
  'inputSchema': {'type': 'object',
                  'properties': {'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'fetchPrivateParams': {'type': 'boolean',
                                                        'description': 'fetchPrivateParams '
                                                                       'parameter'},
                                 'searchValue': {'type': 'string',
                                                 'description': 'searchValue parameter'}},
                  'required': []},
  'metadata': {'path': '/claims/search',
               'method': 'GET',
               'operationId': 'searchClaims',
               'tags': ['Claims'],
               'queryParameters': ['bookmark', 'fetchPrivateParams', 'searchValue']}},
 {'name': 'bitbadges_getClaims',
  'description': 'Get Claims - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetClaimsPayloadV1'}},
                  'required': ['body']},
  'metadata': {'path': '/claims/fetch',
               'method': 'POST',
               'operationId': 'getClaims',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_createClaim',
  'description': 'Create Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateClaimPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/claims',
               'method': 'POST',
               'operationId': 'createClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateClaim',
  'description': 'Update Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateClaimPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/claims',
               'method': 'PUT',
               'operationId': 'updateClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteClaim',
  'description': 'Delete Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteClaimPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/claims',
               'method': 'DELETE',
               'operationId': 'deleteClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_generateAppleWalletPass',
  'description': 'Generate Apple Wallet Pass',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGenerateAppleWalletPassPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbbRequest/appleWalletPass',
               'method': 'POST',
               'operationId': 'generateAppleWalletPass',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_generateGoogleWalletPass',
  'description': 'Generate Google Wallet Pass',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGenerateGoogleWalletPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/siwbbRequest/googleWalletPass',
               'method': 'POST',
               'operationId': 'generateGoogleWalletPass',
               'tags': ['Sign In with BitBadges'],
               'queryParameters': []}},
 {'name': 'bitbadges_generateCode',
  'description': 'Get Code (Codes Plugin)',
  'inputSchema': {'type': 'object',
                  'properties': {'seedCode': {'type': 'string',
                                              'description': 'The seed used to generate the code'},
                                 'idx': {'type': 'integer',
                                         'description': 'The index of the code to generate'}},
                  'required': ['seedCode', 'idx']},
  'metadata': {'path': '/codes',
               'method': 'GET',
               'operationId': 'generateCode',
               'tags': ['Claims'],
               'queryParameters': ['seedCode', 'idx']}},
 {'name': 'bitbadges_getClaimAttempts',
  'description': 'Get Claim Attempts',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string',
                                             'description': 'The ID of the claim'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'includeErrors': {'type': 'boolean',
                                                   'description': 'includeErrors parameter'},
                                 'address': {'type': 'string', 'description': 'address parameter'},
                                 'includeRequestBinAttemptData': {'type': 'boolean',
                                                                  'description': 'includeRequestBinAttemptData '
                                                                                 'parameter'}},
                  'required': ['claimId']},
  'metadata': {'path': '/claims/{claimId}/attempts',
               'method': 'GET',
               'operationId': 'getClaimAttempts',
               'tags': ['Claims'],
               'queryParameters': ['bookmark',
                                   'includeErrors',
                                   'address',
                                   'includeRequestBinAttemptData']}},
 {'name': 'bitbadges_getGatedContentForClaim',
  'description': 'Get Gated Content for Claim',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string',
                                             'description': 'The ID of the claim'}},
                  'required': ['claimId']},
  'metadata': {'path': '/claims/gatedContent/{claimId}',
               'method': 'GET',
               'operationId': 'getGatedContentForClaim',
               'tags': ['Claims'],
               'queryParameters': []}},
 {'name': 'bitbadges_verifyAttestation',
  'description': 'Verify Attestation',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iVerifyAttestationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/attestations/verify',
               'method': 'POST',
               'operationId': 'verifyAttestation',
               'tags': ['Attestations'],
               'queryParameters': []}},
 {'name': 'bitbadges_performStoreActionSingleWithBodyAuth',
  'description': 'Perform Single Store Action (Body Auth)',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iPerformStoreActionSingleWithBodyAuthPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/storeActions/single',
               'method': 'POST',
               'operationId': 'performStoreActionSingleWithBodyAuth',
               'tags': ['Dynamic Stores'],
               'queryParameters': []}},
 {'name': 'bitbadges_performStoreActionBatchWithBodyAuth',
  'description': 'Perform Batch Store Actions (Body Auth)',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iPerformStoreActionBatchWithBodyAuthPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/storeActions/batch',
               'method': 'POST',
               'operationId': 'performStoreActionBatchWithBodyAuth',
               'tags': ['Dynamic Stores'],
               'queryParameters': []}},
 {'name': 'bitbadges_getDynamicDataStores',
  'description': 'Fetch Dynamic Data Stores - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetDynamicDataStoresPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/dynamicStores/fetch',
               'method': 'POST',
               'operationId': 'getDynamicDataStores',
               'tags': ['Dynamic Stores'],
               'queryParameters': []}},
 {'name': 'bitbadges_searchDynamicDataStores',
  'description': 'Search Dynamic Data Stores For User',
  'inputSchema': {'type': 'object',
                  'properties': {'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'}},
                  'required': []},
  'metadata': {'path': '/dynamicStores/search',
               'method': 'GET',
               'operationId': 'searchDynamicDataStores',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['bookmark']}},
 {'name': 'bitbadges_getDynamicDataActivity',
  'description': 'Get Dynamic Data Activity',
  'inputSchema': {'type': 'object',
                  'properties': {'dynamicDataId': {'type': 'string',
                                                   'description': 'dynamicDataId parameter'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'dataSecret': {'type': 'string',
                                                'description': 'dataSecret parameter'}},
                  'required': ['dynamicDataId']},
  'metadata': {'path': '/dynamicStores/activity',
               'method': 'GET',
               'operationId': 'getDynamicDataActivity',
               'tags': ['Dynamic Stores'],
               'queryParameters': ['dynamicDataId', 'bookmark', 'dataSecret']}},
 {'name': 'bitbadges_searchApplications',
  'description': 'Search Applications',
  'inputSchema': {'type': 'object',
                  'properties': {'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'}},
                  'required': []},
  'metadata': {'path': '/applications/search',
               'method': 'GET',
               'operationId': 'searchApplications',
               'tags': ['Applications'],
               'queryParameters': ['bookmark']}},
 {'name': 'bitbadges_getApplications',
  'description': 'Get Applications - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetApplicationsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/applications/fetch',
               'method': 'POST',
               'operationId': 'getApplications',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_createApplication',
  'description': 'Create Application',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateApplicationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/applications',
               'method': 'POST',
               'operationId': 'createApplication',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateApplication',
  'description': 'Update Application',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateApplicationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/applications',
               'method': 'PUT',
               'operationId': 'updateApplication',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteApplication',
  'description': 'Delete Application',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteApplicationPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/applications',
               'method': 'DELETE',
               'operationId': 'deleteApplication',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_calculatePoints',
  'description': 'Calculate Points',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCalculatePointsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/applications/points',
               'method': 'POST',
               'operationId': 'calculatePoints',
               'tags': ['Applications'],
               'queryParameters': []}},
 {'name': 'bitbadges_getPointsActivity',
  'description': 'Get Points Activity',
  'inputSchema': {'type': 'object',
                  'properties': {'applicationId': {'type': 'string',
                                                   'description': 'applicationId parameter'},
                                 'pageId': {'type': 'string', 'description': 'pageId parameter'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'address': {'type': 'string', 'description': 'address parameter'}},
                  'required': ['applicationId', 'pageId']},
  'metadata': {'path': '/applications/points/activity',
               'method': 'GET',
               'operationId': 'getPointsActivity',
               'tags': ['Applications'],
               'queryParameters': ['applicationId', 'pageId', 'bookmark', 'address']}},
 {'name': 'bitbadges_getPlugins',
  'description': 'Get Plugins - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetPluginsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/plugins/fetch',
               'method': 'POST',
               'operationId': 'getPlugins',
               'tags': ['Plugins'],
               'queryParameters': []}},
 {'name': 'bitbadges_searchPlugins',
  'description': 'Search Plugins',
  'inputSchema': {'type': 'object',
                  'properties': {'pluginsForSignedInUser': {'type': 'boolean',
                                                            'description': 'pluginsForSignedInUser '
                                                                           'parameter'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'searchValue': {'type': 'string',
                                                 'description': 'searchValue parameter'},
                                 'locale': {'type': 'string', 'description': 'locale parameter'}},
                  'required': []},
  'metadata': {'path': '/plugins/search',
               'method': 'GET',
               'operationId': 'searchPlugins',
               'tags': ['Plugins'],
               'queryParameters': ['pluginsForSignedInUser', 'bookmark', 'searchValue', 'locale']}},
 {'name': 'bitbadges_getUtilityListings',
  'description': 'Get Utility Listings - Batch',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iGetUtilityListingsPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/utilityListings/fetch',
               'method': 'POST',
               'operationId': 'getUtilityListings',
               'tags': ['Utility Listings'],
               'queryParameters': []}},
 {'name': 'bitbadges_searchUtilityListings',
  'description': 'Search Utility Listings',
  'inputSchema': {'type': 'object',
                  'properties': {'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'}},
                  'required': []},
  'metadata': {'path': '/utilityListings/search',
               'method': 'GET',
               'operationId': 'searchUtilityListings',
               'tags': ['Utility Listings'],
               'queryParameters': ['bookmark']}},
 {'name': 'bitbadges_createUtilityListing',
  'description': 'Create Utility Listing',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iCreateUtilityListingPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/utilityListings',
               'method': 'POST',
               'operationId': 'createUtilityListing',
               'tags': ['Utility Listings'],
               'queryParameters': []}},
 {'name': 'bitbadges_updateUtilityListing',
  'description': 'Update Utility Listing',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUpdateUtilityListingPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/utilityListings',
               'method': 'PUT',
               'operationId': 'updateUtilityListing',
               'tags': ['Utility Listings'],
               'queryParameters': []}},
 {'name': 'bitbadges_deleteUtilityListing',
  'description': 'Delete Utility Listing',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iDeleteUtilityListingPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/utilityListings',
               'method': 'DELETE',
               'operationId': 'deleteUtilityListing',
               'tags': ['Utility Listings'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAddressListsForUser',
  'description': 'Get Address Lists For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'viewType': {'type': 'string',
                                              'description': 'viewType parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/lists',
               'method': 'GET',
               'operationId': 'getAddressListsForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst', 'viewType']}},
 {'name': 'bitbadges_getSiwbbRequestsForUser',
  'description': 'Get SIWBB Requests For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/requests/siwbb',
               'method': 'GET',
               'operationId': 'getSiwbbRequestsForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getTransferActivityForUser',
  'description': 'Get Transfer Activity For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/activity/badges',
               'method': 'GET',
               'operationId': 'getTransferActivityForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_GetBadgesViewForUser',
  'description': 'Get Badges For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'collectionId': {'type': 'string',
                                                  'description': 'collectionId parameter'},
                                 'viewType': {'type': 'string',
                                              'description': 'viewType parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/badges/',
               'method': 'GET',
               'operationId': 'GetBadgesViewForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst', 'collectionId', 'viewType']}},
 {'name': 'bitbadges_getListActivityForUser',
  'description': 'Get Lists Activity For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/activity/lists',
               'method': 'GET',
               'operationId': 'getListActivityForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getAttestationsForUser',
  'description': 'Get Attestations For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'viewType': {'type': 'string',
                                              'description': 'viewType parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/attestations/',
               'method': 'GET',
               'operationId': 'getAttestationsForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst', 'viewType']}},
 {'name': 'bitbadges_getClaimActivityForUser',
  'description': 'Get Claim Activity For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'viewType': {'type': 'string',
                                              'description': 'viewType parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/activity/claims',
               'method': 'GET',
               'operationId': 'getClaimActivityForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst', 'viewType']}},
 {'name': 'bitbadges_getPointsActivityForUser',
  'description': 'Get Points Activity For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/activity/points',
               'method': 'GET',
               'operationId': 'getPointsActivityForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getClaimAlertsForUser',
  'description': 'Get Claim Alerts For User',
  'inputSchema': {'type': 'object',
                  'properties': {'address': {'type': 'string', 'description': 'Account address'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'viewType': {'type': 'string',
                                              'description': 'viewType parameter'}},
                  'required': ['address']},
  'metadata': {'path': '/account/{address}/claimAlerts',
               'method': 'GET',
               'operationId': 'getClaimAlertsForUser',
               'tags': ['Accounts'],
               'queryParameters': ['bookmark', 'oldestFirst', 'viewType']}},
 {'name': 'bitbadges_getAddressListActivity',
  'description': 'Get Address List Activity',
  'inputSchema': {'type': 'object',
                  'properties': {'addressListId': {'type': 'string',
                                                   'description': 'Address list ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'}},
                  'required': ['addressListId']},
  'metadata': {'path': '/addressLists/{addressListId}/activity',
               'method': 'GET',
               'operationId': 'getAddressListActivity',
               'tags': ['Address Lists'],
               'queryParameters': ['bookmark']}},
 {'name': 'bitbadges_getAddressListListings',
  'description': 'Get Address List Listings',
  'inputSchema': {'type': 'object',
                  'properties': {'addressListId': {'type': 'string',
                                                   'description': 'Address list ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'}},
                  'required': ['addressListId']},
  'metadata': {'path': '/addressLists/{addressListId}/listings',
               'method': 'GET',
               'operationId': 'getAddressListListings',
               'tags': ['Address Lists'],
               'queryParameters': ['bookmark']}},
 {'name': 'bitbadges_getCollectionOwners',
  'description': 'Get Collection Owners',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/owners',
               'method': 'GET',
               'operationId': 'getCollectionOwners',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getCollectionTransferActivity',
  'description': 'Get Collection Transfer Activity',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'address': {'type': 'string', 'description': 'address parameter'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/activity',
               'method': 'GET',
               'operationId': 'getCollectionTransferActivity',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'oldestFirst', 'address']}},
 {'name': 'bitbadges_getCollectionChallengeTrackers',
  'description': 'Get Collection Challenge Trackers',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/challengeTrackers',
               'method': 'GET',
               'operationId': 'getCollectionChallengeTrackers',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getCollectionAmountTrackers',
  'description': 'Get Collection Amount Trackers',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/amountTrackers',
               'method': 'GET',
               'operationId': 'getCollectionAmountTrackers',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'oldestFirst']}},
 {'name': 'bitbadges_getCollectionAmountTrackerById',
  'description': 'Get Collection Amount Tracker By ID',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string',
                                                  'description': 'collectionId parameter'},
                                 'approvalId': {'type': 'string',
                                                'description': 'approvalId parameter'},
                                 'amountTrackerId': {'type': 'string',
                                                     'description': 'amountTrackerId parameter'},
                                 'approvalLevel': {'type': 'string',
                                                   'description': 'approvalLevel parameter'},
                                 'approverAddress': {'type': 'string',
                                                     'description': 'approverAddress parameter'},
                                 'trackerType': {'type': 'string',
                                                 'description': 'trackerType parameter'},
                                 'approvedAddress': {'type': 'string',
                                                     'description': 'approvedAddress parameter'}},
                  'required': ['collectionId',
                               'approvalId',
                               'amountTrackerId',
                               'approvalLevel',
                               'approverAddress',
                               'trackerType',
                               'approvedAddress']},
  'metadata': {'path': '/api/v0/collection/amountTracker',
               'method': 'GET',
               'operationId': 'getCollectionAmountTrackerById',
               'tags': ['Badges'],
               'queryParameters': ['collectionId',
                                   'approvalId',
                                   'amountTrackerId',
                                   'approvalLevel',
                                   'approverAddress',
                                   'trackerType',
                                   'approvedAddress']}},
 {'name': 'bitbadges_getCollectionChallengeTrackerById',
  'description': 'Get Collection Challenge Tracker By ID',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string',
                                                  'description': 'collectionId parameter'},
                                 'approvalId': {'type': 'string',
                                                'description': 'approvalId parameter'},
                                 'challengeTrackerId': {'type': 'string',
                                                        'description': 'challengeTrackerId '
                                                                       'parameter'},
                                 'approvalLevel': {'type': 'string',
                                                   'description': 'approvalLevel parameter'},
                                 'approverAddress': {'type': 'string',
                                                     'description': 'approverAddress parameter'}},
                  'required': ['collectionId',
                               'approvalId',
                               'challengeTrackerId',
                               'approvalLevel',
                               'approverAddress']},
  'metadata': {'path': '/api/v0/collection/challengeTracker',
               'method': 'GET',
               'operationId': 'getCollectionChallengeTrackerById',
               'tags': ['Badges'],
               'queryParameters': ['collectionId',
                                   'approvalId',
                                   'challengeTrackerId',
                                   'approvalLevel',
                                   'approverAddress']}},
 {'name': 'bitbadges_getCollectionListings',
  'description': 'Get Collection Listings',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string', 'description': 'Collection ID'},
                                 'bookmark': {'type': 'string',
                                              'description': 'bookmark parameter'},
                                 'oldestFirst': {'type': 'boolean',
                                                 'description': 'oldestFirst parameter'},
                                 'badgeId': {'type': 'string', 'description': 'badgeId parameter'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/listings',
               'method': 'GET',
               'operationId': 'getCollectionListings',
               'tags': ['Badges'],
               'queryParameters': ['bookmark', 'oldestFirst', 'badgeId']}},
 {'name': 'bitbadges_getCollectionClaims',
  'description': 'Get Collection Claims',
  'inputSchema': {'type': 'object',
                  'properties': {'collectionId': {'type': 'string',
                                                  'description': 'Collection ID'}},
                  'required': ['collectionId']},
  'metadata': {'path': '/collection/{collectionId}/claims',
               'method': 'GET',
               'operationId': 'getCollectionClaims',
               'tags': ['Badges'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAddressListClaims',
  'description': 'Get Address List Claims',
  'inputSchema': {'type': 'object',
                  'properties': {'addressListId': {'type': 'string',
                                                   'description': 'Address list ID'}},
                  'required': ['addressListId']},
  'metadata': {'path': '/addressLists/{addressListId}/claims',
               'method': 'GET',
               'operationId': 'getAddressListClaims',
               'tags': ['Address Lists'],
               'queryParameters': []}},
 {'name': 'bitbadges_getAttemptDataFromRequestBin',
  'description': 'Get Attempt Data (Request Bin)',
  'inputSchema': {'type': 'object',
                  'properties': {'claimId': {'type': 'string', 'description': 'Claim ID'},
                                 'claimAttemptId': {'type': 'string',
                                                    'description': 'Claim attempt ID'},
                                 'instanceId': {'type': 'string',
                                                'description': 'instanceId parameter'}},
                  'required': ['claimId', 'claimAttemptId']},
  'metadata': {'path': '/api/v0/requestBin/attemptData/{claimId}/{claimAttemptId}',
               'method': 'GET',
               'operationId': 'getAttemptDataFromRequestBin',
               'tags': ['Claims'],
               'queryParameters': ['instanceId']}},
 {'name': 'bitbadges_uploadBalances',
  'description': 'Upload Balances',
  'inputSchema': {'type': 'object',
                  'properties': {'body': {'$ref': '#/components/schemas/iUploadBalancesPayload'}},
                  'required': ['body']},
  'metadata': {'path': '/api/v0/uploadBalances',
               'method': 'POST',
               'operationId': 'uploadBalances',
               'tags': ['Badges'],
               'queryParameters': []}}]


async def handle_get_account(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Account'
    endpoint = f"/user"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['address', 'username'])
    )


async def handle_get_accounts(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Accounts - Batch'
    endpoint = f"/users"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_collection(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_badge_metadata(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badge Metadata'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/{path_arg(args, 'badgeId')}/metadata"
    return await gateway.request(endpoint, "GET")


async def handle_get_collections_batch(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collections - Batch'
    endpoint = f"/collections"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_badge_balance_by_address_specific_badge(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badge Balance By Address - Specific Badge'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/balance/{path_arg(args, 'address')}/{path_arg(args, 'badgeId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_badge_balance_by_address(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badge Balances By Address'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/balance/{path_arg(args, 'address')}"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['fetchPrivateParams', 'forceful'])
    )


async def handle_get_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claim'
    endpoint = f"/claim/{path_arg(args, 'claimId')}"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['fetchPrivateParams', 'fetchAllClaimedUsers', 'privateStatesToFetch'])
    )


async def handle_check_claim_success(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Check Claim Successes By User'
    endpoint = f"/claims/success/{path_arg(args, 'claimId')}/{path_arg(args, 'address')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_attestation(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Attestation'
    endpoint = f"/attestation/{path_arg(args, 'attestationId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_developer_app(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get OAuth App'
    endpoint = f"/developerApp/{path_arg(args, 'clientId')}"
    return await gateway.request(endpoint, "GET")


async def handle_create_developer_app(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create OAuth App'
    endpoint = f"/developerApps"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_developer_app(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update OAuth App'
    endpoint = f"/developerApps"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_developer_app(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete OAuth App'
    endpoint = f"/developerApps"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_get_plugin(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Plugin'
    endpoint = f"/plugin/{path_arg(args, 'pluginId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_utility_listing(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Utility Listing'
    endpoint = f"/utilityListing/{path_arg(args, 'utilityListingId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_dynamic_data_store(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Dynamic Data Store'
    endpoint = f"/dynamicStore/{path_arg(args, 'dynamicStoreId')}"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['dataSecret'])
    )


async def handle_get_dynamic_data_store_value(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Dynamic Data Store Value'
    endpoint = f"/dynamicStore/{path_arg(args, 'dynamicStoreId')}/value"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['key', 'dataSecret', 'lookupType'])
    )


async def handle_get_dynamic_data_store_values_paginated(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Dynamic Data Store Values Paginated'
    endpoint = f"/dynamicStore/{path_arg(args, 'dynamicStoreId')}/values"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['dataSecret', 'bookmark', 'lookupType'])
    )


async def handle_create_dynamic_data_store(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create Dynamic Data Store'
    endpoint = f"/dynamicStores"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_dynamic_data_store(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Dynamic Data Store'
    endpoint = f"/dynamicStores"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_dynamic_data_store(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Dynamic Data Store'
    endpoint = f"/dynamicStores"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_get_application(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Application'
    endpoint = f"/application/{path_arg(args, 'applicationId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_address_list(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address List'
    endpoint = f"/addressList/{path_arg(args, 'addressListId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_status(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Status'
    endpoint = f"/status"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['withOutOfSyncCheck'])
    )


async def handle_get_owners_for_badge(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badge Owners'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/{path_arg(args, 'badgeId')}/owners"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'sortBy'])
    )


async def handle_get_badge_activity(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badge Activity'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/{path_arg(args, 'badgeId')}/activity"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'bitbadgesAddress'])
    )


async def handle_complete_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Complete Claim'
    endpoint = f"/claims/complete/{path_arg(args, 'claimId')}/{path_arg(args, 'address')}"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_simulate_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Simulate Claim'
    endpoint = f"/claims/simulate/{path_arg(args, 'claimId')}/{path_arg(args, 'address')}"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_reserved_codes(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Reserved Claim Codes'
    endpoint = f"/claims/reserved/{path_arg(args, 'claimId')}/{path_arg(args, 'address')}"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_claim_attempt_status(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claim Attempt Status'
    endpoint = f"/claims/status/{path_arg(args, 'claimAttemptId')}"
    return await gateway.request(endpoint, "GET")


async def handle_broadcast_tx(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Broadcast Transaction'
    endpoint = f"/broadcast"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_simulate_tx(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Simulate Transaction'
    endpoint = f"/simulate"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_create_address_lists(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Creates Address Lists'
    endpoint = f"/addressLists"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_delete_address_lists(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Address Lists'
    endpoint = f"/addressLists"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_update_address_list_core_details(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Address List Core Details'
    endpoint = f"/addressLists/coreDetails"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_update_address_list_addresses(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Address List Addresses'
    endpoint = f"/addressLists/addresses"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_get_address_lists(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address Lists - Batch'
    endpoint = f"/addressLists/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_exchange_siwbb_authorization_code(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Exchange SIWBB Code'
    endpoint = f"/siwbb/token"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_revoke_oauth_authorization(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Revoke Authorization'
    endpoint = f"/siwbb/token/revoke"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_rotate_siwbb_request(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Rotate SIWBB Request'
    endpoint = f"/siwbbRequest/rotate"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_delete_siwbb_request(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete SIWBB Request'
    endpoint = f"/siwbbRequest"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_create_siwbb_request(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create SIWBB Request'
    endpoint = f"/siwbbRequest"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_siwbb_requests_for_developer_app(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get SIWBB Requests For Developer App'
    endpoint = f"/developerApps/siwbbRequests"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'clientId'])
    )


async def handle_send_claim_alert(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Sends Claim Alert'
    endpoint = f"/claimAlerts/send"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_refresh_status(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Refresh Status'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/refreshStatus"
    return await gateway.request(endpoint, "GET")


async def handle_get_map(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Map'
    endpoint = f"/maps/{path_arg(args, 'mapId')}"
    return await gateway.request(endpoint, "GET")


async def handle_get_maps(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Maps - Batch'
    endpoint = f"/maps"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_map_values(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Map Values - Batch'
    endpoint = f"/mapValues"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_map_value(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Map Value'
    endpoint = f"/mapValue/{path_arg(args, 'mapId')}/{path_arg(args, 'key')}"
    return await gateway.request(endpoint, "GET")


async def handle_create_attestation(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create Attestation'
    endpoint = f"/attestations"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_attestation(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Attestation'
    endpoint = f"/attestations"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_attestation(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Attestation'
    endpoint = f"/attestations"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_search_claims(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Search Claims'
    endpoint = f"/claims/search"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'fetchPrivateParams', 'searchValue'])
    )


async def handle_get_claims(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claims - Batch'
    endpoint = f"/claims/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_create_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create Claim'
    endpoint = f"/claims"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Claim'
    endpoint = f"/claims"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Claim'
    endpoint = f"/claims"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_generate_apple_wallet_pass(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Generate Apple Wallet Pass'
    endpoint = f"/siwbbRequest/appleWalletPass"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_generate_google_wallet_pass(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Generate Google Wallet Pass'
    endpoint = f"/siwbbRequest/googleWalletPass"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_generate_code(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Code (Codes Plugin)'
    endpoint = f"/codes"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['seedCode', 'idx'])
    )


async def handle_get_claim_attempts(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claim Attempts'
    endpoint = f"/claims/{path_arg(args, 'claimId')}/attempts"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'includeErrors', 'address', 'includeRequestBinAttemptData'])
    )


async def handle_get_gated_content_for_claim(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Gated Content for Claim'
    endpoint = f"/claims/gatedContent/{path_arg(args, 'claimId')}"
    return await gateway.request(endpoint, "GET")


async def handle_verify_attestation(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Verify Attestation'
    endpoint = f"/attestations/verify"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_perform_store_action_single_with_body_auth(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Perform Single Store Action (Body Auth)'
    endpoint = f"/storeActions/single"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_perform_store_action_batch_with_body_auth(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Perform Batch Store Actions (Body Auth)'
    endpoint = f"/storeActions/batch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_dynamic_data_stores(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Fetch Dynamic Data Stores - Batch'
    endpoint = f"/dynamicStores/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_search_dynamic_data_stores(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Search Dynamic Data Stores For User'
    endpoint = f"/dynamicStores/search"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark'])
    )


async def handle_get_dynamic_data_activity(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Dynamic Data Activity'
    endpoint = f"/dynamicStores/activity"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['dynamicDataId', 'bookmark', 'dataSecret'])
    )


async def handle_search_applications(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Search Applications'
    endpoint = f"/applications/search"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark'])
    )


async def handle_get_applications(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Applications - Batch'
    endpoint = f"/applications/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_create_application(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create Application'
    endpoint = f"/applications"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_application(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Application'
    endpoint = f"/applications"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_application(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Application'
    endpoint = f"/applications"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_calculate_points(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Calculate Points'
    endpoint = f"/applications/points"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_get_points_activity(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Points Activity'
    endpoint = f"/applications/points/activity"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['applicationId', 'pageId', 'bookmark', 'address'])
    )


async def handle_get_plugins(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Plugins - Batch'
    endpoint = f"/plugins/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_search_plugins(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Search Plugins'
    endpoint = f"/plugins/search"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['pluginsForSignedInUser', 'bookmark', 'searchValue', 'locale'])
    )


async def handle_get_utility_listings(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Utility Listings - Batch'
    endpoint = f"/utilityListings/fetch"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_search_utility_listings(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Search Utility Listings'
    endpoint = f"/utilityListings/search"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark'])
    )


async def handle_create_utility_listing(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Create Utility Listing'
    endpoint = f"/utilityListings"
    return await gateway.request(endpoint, 'POST', body=args or {})


async def handle_update_utility_listing(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Update Utility Listing'
    endpoint = f"/utilityListings"
    return await gateway.request(endpoint, 'PUT', body=args or {})


async def handle_delete_utility_listing(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Delete Utility Listing'
    endpoint = f"/utilityListings"
    return await gateway.request(endpoint, 'DELETE', body=args or {})


async def handle_get_address_lists_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address Lists For User'
    endpoint = f"/account/{path_arg(args, 'address')}/lists"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'viewType'])
    )


async def handle_get_siwbb_requests_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get SIWBB Requests For User'
    endpoint = f"/account/{path_arg(args, 'address')}/requests/siwbb"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_transfer_activity_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Transfer Activity For User'
    endpoint = f"/account/{path_arg(args, 'address')}/activity/badges"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_badges_view_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Badges For User'
    endpoint = f"/account/{path_arg(args, 'address')}/badges/"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'collectionId', 'viewType'])
    )


async def handle_get_list_activity_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Lists Activity For User'
    endpoint = f"/account/{path_arg(args, 'address')}/activity/lists"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_attestations_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Attestations For User'
    endpoint = f"/account/{path_arg(args, 'address')}/attestations/"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'viewType'])
    )


async def handle_get_claim_activity_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claim Activity For User'
    endpoint = f"/account/{path_arg(args, 'address')}/activity/claims"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'viewType'])
    )


async def handle_get_points_activity_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Points Activity For User'
    endpoint = f"/account/{path_arg(args, 'address')}/activity/points"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_claim_alerts_for_user(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Claim Alerts For User'
    endpoint = f"/account/{path_arg(args, 'address')}/claimAlerts"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'viewType'])
    )


async def handle_get_address_list_activity(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address List Activity'
    endpoint = f"/addressLists/{path_arg(args, 'addressListId')}/activity"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark'])
    )


async def handle_get_address_list_listings(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address List Listings'
    endpoint = f"/addressLists/{path_arg(args, 'addressListId')}/listings"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark'])
    )


async def handle_get_collection_owners(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Owners'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/owners"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_collection_transfer_activity(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Transfer Activity'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/activity"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'address'])
    )


async def handle_get_collection_challenge_trackers(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Challenge Trackers'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/challengeTrackers"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_collection_amount_trackers(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Amount Trackers'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/amountTrackers"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst'])
    )


async def handle_get_collection_amount_tracker_by_id(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Amount Tracker By ID'
    endpoint = f"/collection/amountTracker"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['collectionId',
 'approvalId',
 'amountTrackerId',
 'approvalLevel',
 'approverAddress',
 'trackerType',
 'approvedAddress'])
    )


async def handle_get_collection_challenge_tracker_by_id(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Challenge Tracker By ID'
    endpoint = f"/collection/challengeTracker"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['collectionId', 'approvalId', 'challengeTrackerId', 'approvalLevel', 'approverAddress'])
    )


async def handle_get_collection_listings(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Listings'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/listings"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['bookmark', 'oldestFirst', 'badgeId'])
    )


async def handle_get_collection_claims(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Collection Claims'
    endpoint = f"/collection/{path_arg(args, 'collectionId')}/claims"
    return await gateway.request(endpoint, "GET")


async def handle_get_address_list_claims(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Address List Claims'
    endpoint = f"/addressLists/{path_arg(args, 'addressListId')}/claims"
    return await gateway.request(endpoint, "GET")


async def handle_get_attempt_data_from_request_bin(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Get Attempt Data (Request Bin)'
    endpoint = f"/requestBin/attemptData/{path_arg(args, 'claimId')}/{path_arg(args, 'claimAttemptId')}"
    return await gateway.request(
        endpoint, "GET", query=query_args(args, ['instanceId'])
    )


async def handle_upload_balances(gateway: Gateway, args: dict[str, Any]) -> Any:
    'Upload Balances'
    endpoint = f"/uploadBalances"
    return await gateway.request(endpoint, 'POST', body=args or {})


HANDLERS: dict[str, Handler] = {
    'bitbadges_getAccount': handle_get_account,
    'bitbadges_getAccounts': handle_get_accounts,
    'bitbadges_getCollection': handle_get_collection,
    'bitbadges_getBadgeMetadata': handle_get_badge_metadata,
    'bitbadges_getCollectionsBatch': handle_get_collections_batch,
    'bitbadges_getBadgeBalanceByAddressSpecificBadge': handle_get_badge_balance_by_address_specific_badge,
    'bitbadges_getBadgeBalanceByAddress': handle_get_badge_balance_by_address,
    'bitbadges_getClaim': handle_get_claim,
    'bitbadges_checkClaimSuccess': handle_check_claim_success,
    'bitbadges_getAttestation': handle_get_attestation,
    'bitbadges_getDeveloperApp': handle_get_developer_app,
    'bitbadges_createDeveloperApp': handle_create_developer_app,
    'bitbadges_updateDeveloperApp': handle_update_developer_app,
    'bitbadges_deleteDeveloperApp': handle_delete_developer_app,
    'bitbadges_getPlugin': handle_get_plugin,
    'bitbadges_getUtilityListing': handle_get_utility_listing,
    'bitbadges_getDynamicDataStore': handle_get_dynamic_data_store,
    'bitbadges_getDynamicDataStoreValue': handle_get_dynamic_data_store_value,
    'bitbadges_getDynamicDataStoreValuesPaginated': handle_get_dynamic_data_store_values_paginated,
    'bitbadges_createDynamicDataStore': handle_create_dynamic_data_store,
    'bitbadges_updateDynamicDataStore': handle_update_dynamic_data_store,
    'bitbadges_deleteDynamicDataStore': handle_delete_dynamic_data_store,
    'bitbadges_getApplication': handle_get_application,
    'bitbadges_getAddressList': handle_get_address_list,
    'bitbadges_getStatus': handle_get_status,
    'bitbadges_getOwnersForBadge': handle_get_owners_for_badge,
    'bitbadges_getBadgeActivity': handle_get_badge_activity,
    'bitbadges_completeClaim': handle_complete_claim,
    'bitbadges_simulateClaim': handle_simulate_claim,
    'bitbadges_getReservedCodes': handle_get_reserved_codes,
    'bitbadges_getClaimAttemptStatus': handle_get_claim_attempt_status,
    'bitbadges_broadcastTx': handle_broadcast_tx,
    'bitbadges_simulateTx': handle_simulate_tx,
    'bitbadges_createAddressLists': handle_create_address_lists,
    'bitbadges_deleteAddressLists': handle_delete_address_lists,
    'bitbadges_updateAddressListCoreDetails': handle_update_address_list_core_details,
    'bitbadges_updateAddressListAddresses': handle_update_address_list_addresses,
    'bitbadges_getAddressLists': handle_get_address_lists,
    'bitbadges_exchangeSIWBBAuthorizationCode': handle_exchange_siwbb_authorization_code,
    'bitbadges_revokeOauthAuthorization': handle_revoke_oauth_authorization,
    'bitbadges_rotateSIWBBRequest': handle_rotate_siwbb_request,
    'bitbadges_deleteSIWBBRequest': handle_delete_siwbb_request,
    'bitbadges_createSIWBBRequest': handle_create_siwbb_request,
    'bitbadges_getSIWBBRequestsForDeveloperApp': handle_get_siwbb_requests_for_developer_app,
    'bitbadges_sendClaimAlert': handle_send_claim_alert,
    'bitbadges_getRefreshStatus': handle_get_refresh_status,
    'bitbadges_getMap': handle_get_map,
    'bitbadges_getMaps': handle_get_maps,
    'bitbadges_getMapValues': handle_get_map_values,
    'bitbadges_getMapValue': handle_get_map_value,
    'bitbadges_createAttestation': handle_create_attestation,
    'bitbadges_updateAttestation': handle_update_attestation,
    'bitbadges_deleteAttestation': handle_delete_attestation,
    'bitbadges_searchClaims': handle_search_claims,
    'bitbadges_getClaims': handle_get_claims,
    'bitbadges_createClaim': handle_create_claim,
    'bitbadges_updateClaim': handle_update_claim,
    'bitbadges_deleteClaim': handle_delete_claim,
    'bitbadges_generateAppleWalletPass': handle_generate_apple_wallet_pass,
    'bitbadges_generateGoogleWalletPass': handle_generate_google_wallet_pass,
    'bitbadges_generateCode': handle_generate_code,
    'bitbadges_getClaimAttempts': handle_get_claim_attempts,
    'bitbadges_getGatedContentForClaim': handle_get_gated_content_for_claim,
    'bitbadges_verifyAttestation': handle_verify_attestation,
    'bitbadges_performStoreActionSingleWithBodyAuth': handle_perform_store_action_single_with_body_auth,
    'bitbadges_performStoreActionBatchWithBodyAuth': handle_perform_store_action_batch_with_body_auth,
    'bitbadges_getDynamicDataStores': handle_get_dynamic_data_stores,
    'bitbadges_searchDynamicDataStores': handle_search_dynamic_data_stores,
    'bitbadges_getDynamicDataActivity': handle_get_dynamic_data_activity,
    'bitbadges_searchApplications': handle_search_applications,
    'bitbadges_getApplications': handle_get_applications,
    'bitbadges_createApplication': handle_create_application,
    'bitbadges_updateApplication': handle_update_application,
    'bitbadges_deleteApplication': handle_delete_application,
    'bitbadges_calculatePoints': handle_calculate_points,
    'bitbadges_getPointsActivity': handle_get_points_activity,
    'bitbadges_getPlugins': handle_get_plugins,
    'bitbadges_searchPlugins': handle_search_plugins,
    'bitbadges_getUtilityListings': handle_get_utility_listings,
    'bitbadges_searchUtilityListings': handle_search_utility_listings,
    'bitbadges_createUtilityListing': handle_create_utility_listing,
    'bitbadges_updateUtilityListing': handle_update_utility_listing,
    'bitbadges_deleteUtilityListing': handle_delete_utility_listing,
    'bitbadges_getAddressListsForUser': handle_get_address_lists_for_user,
    'bitbadges_getSiwbbRequestsForUser': handle_get_siwbb_requests_for_user,
    'bitbadges_getTransferActivityForUser': handle_get_transfer_activity_for_user,
    'bitbadges_GetBadgesViewForUser': handle_get_badges_view_for_user,
    'bitbadges_getListActivityForUser': handle_get_list_activity_for_user,
    'bitbadges_getAttestationsForUser': handle_get_attestations_for_user,
    'bitbadges_getClaimActivityForUser': handle_get_claim_activity_for_user,
    'bitbadges_getPointsActivityForUser': handle_get_points_activity_for_user,
    'bitbadges_getClaimAlertsForUser': handle_get_claim_alerts_for_user,
    'bitbadges_getAddressListActivity': handle_get_address_list_activity,
    'bitbadges_getAddressListListings': handle_get_address_list_listings,
    'bitbadges_getCollectionOwners': handle_get_collection_owners,
    'bitbadges_getCollectionTransferActivity': handle_get_collection_transfer_activity,
    'bitbadges_getCollectionChallengeTrackers': handle_get_collection_challenge_trackers,
    'bitbadges_getCollectionAmountTrackers': handle_get_collection_amount_trackers,
    'bitbadges_getCollectionAmountTrackerById': handle_get_collection_amount_tracker_by_id,
    'bitbadges_getCollectionChallengeTrackerById': handle_get_collection_challenge_tracker_by_id,
    'bitbadges_getCollectionListings': handle_get_collection_listings,
    'bitbadges_getCollectionClaims': handle_get_collection_claims,
    'bitbadges_getAddressListClaims': handle_get_address_list_claims,
    'bitbadges_getAttemptDataFromRequestBin': handle_get_attempt_data_from_request_bin,
    'bitbadges_uploadBalances': handle_upload_balances,
}


def create_gateway(**kwargs: Any) -> Gateway:
    """Build a gateway over the generated catalog."""
    return Gateway(TOOLS, HANDLERS, **kwargs)


if __name__ == "__main__":
    main(create_gateway)
